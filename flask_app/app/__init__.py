from flask import Flask


def create_app(seaport_source=None):
    """Initialize Flask app

    seaport_source: zero-argument callable returning the seaport list.
    Defaults to the one selected by ZONE_SEAPORT_SOURCE.
    """
    app = Flask(__name__)

    if seaport_source is None:
        from flask_app.app.seaport_sources import seaport_source_from_env
        seaport_source = seaport_source_from_env()
    app.config["SEAPORT_SOURCE"] = seaport_source

    from flask_app.app.routes import main_bp
    app.register_blueprint(main_bp)

    return app
