"""
Routes for the main blueprint — health check.
"""

from flask import current_app
from sqlalchemy import text

from orgservices.blueprints.main import bp
from orgservices.extensions import db


@bp.route("/health")
def health_check():
    """
    Health check endpoint for monitoring and load balancers.

    Returns 200 if the app is running and can reach the database.
    """
    services = current_app.config["ENABLED_SERVICES"]
    try:
        db.session.execute(text("SELECT 1"))
        return {"status": "healthy", "database": "connected", "services": services}, 200
    except Exception as exc:  # pylint: disable=broad-except
        db.session.rollback()
        return {"status": "unhealthy", "database": str(exc), "services": services}, 503
