import logging
from flask import request

from flask_app.setup_imports import *
from flask_app.app import create_app

LOG = logging.getLogger(__name__)


def main():
    app = create_app()

    # ✅ Log every request Flask processes
    @app.before_request
    def log_request():
        LOG.info(f"🔹 Flask received request: {request.method} {request.path}")

    debug = os.environ.get("FLASK_DEBUG", "0") in ("1", "true", "True")
    port = int(os.environ.get("PORT", "5000"))
    LOG.info(f"✅ Zone service starting on port {port} (debug={debug})")
    app.run(debug=debug, port=port)


if __name__ == '__main__':
    main()
