"""
Ingestion layer — tournament entry source.

Submodules:
  edhtop16_client — async GraphQL client for commander tournament entries
"""
