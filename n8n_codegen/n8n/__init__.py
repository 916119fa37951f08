"""n8n REST API access."""

from .client import create_n8n_client, fetch_workflow

__all__ = ['create_n8n_client', 'fetch_workflow']
