"""Core logic for the admin proxy, independent of Flask.

Module Structure:
    - gotrue/       : GoTrue admin API client and user operations
    - validators.py : Request field presence checks

Import explicitly when needed:
    from admin_proxy.core.gotrue import GoTrueClient, UserService
    from admin_proxy.core.validators import require_fields
"""
