"""
Extensions Module - Centralized initialization of Flask extensions
Decouples extensions from the main app.py to avoid circular imports
and enable better testing.
"""

from utils.contact import ContactFlowRegistry

# Initialize extensions without binding to app
contact_flows = ContactFlowRegistry()

__all__ = ['contact_flows']
