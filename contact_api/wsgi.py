"""
WSGI entry point for serverless and container deployments.
"""

import os

from .app import create_app

# Deployment platforms expect the WSGI application to be named 'app'
app = create_app()

if __name__ == "__main__":
    app.run(debug=False, host="0.0.0.0", port=int(os.environ.get("PORT", 5000)))
