"""Super Admin API package.

To build the Flask app:
    from admin_proxy.flask_app import create_app

To use the identity provider client directly:
    from admin_proxy.core.gotrue import GoTrueClient, UserService
"""
