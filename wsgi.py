"""WSGI entry point for the elder-care planner service."""

import os
import sys

from eldercare_planner import create_app

app = create_app()

if __name__ == "__main__":
    port = 5000

    # PORT environment variable (used by Render, Heroku, etc.)
    if "PORT" in os.environ:
        port = int(os.environ["PORT"])

    if len(sys.argv) > 2 and sys.argv[1] == "--port":
        port = int(sys.argv[2])

    app.run(debug=app.config["DEBUG"], host="0.0.0.0", port=port)
