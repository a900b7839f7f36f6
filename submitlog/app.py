from flask import Flask, Response, abort, current_app, request
from flask_cors import CORS
from werkzeug.exceptions import ClientDisconnected, HTTPException

from submitlog import config
from submitlog.forward import send_log
from submitlog.store import LogFile


def plain(message, status):
    return Response(message + "\n", status=status, mimetype="text/plain")


def get_log_file():
    return current_app.extensions["submitlog"]


def allowed_methods(settings):
    methods = ["POST"]
    if settings["DATA_ENDPOINT"]:
        methods.append("GET")
    methods.append("OPTIONS")
    return methods


def submit():
    try:
        body = request.get_data(cache=False)
    except ClientDisconnected:
        return plain("failed to read body", 400)

    if not body:
        return plain("empty body", 400)

    # open and write failures are logged by LogFile
    try:
        get_log_file().append(body)
    except OSError:
        return plain("server error", 500)

    url = current_app.config["LOGGER_URL"]
    if url:
        send_log(url, "submission: " + body.decode("utf-8", "replace"))

    return Response('{"status":"ok"}', mimetype="application/json")


def data():
    # werkzeug maps HEAD onto GET rules
    if request.method != "GET":
        abort(405, valid_methods=["GET"])

    log_file = get_log_file()
    try:
        content = log_file.read()
    except FileNotFoundError:
        return plain("file not found", 404)
    except OSError:
        current_app.logger.exception("read error on %s", log_file.path)
        return plain("server error", 500)

    return Response(content, mimetype="text/plain")


def http_error(e):
    response = plain(e.name.lower(), e.code)
    valid_methods = getattr(e, "valid_methods", None)
    if valid_methods:
        response.headers["Allow"] = ", ".join(valid_methods)
    return response


def create_app(**overrides):
    settings = config.load()
    settings.update(overrides)

    app = Flask(__name__)
    app.config.update(settings)
    app.logger.setLevel(app.config["LOG_LEVEL"])

    app.extensions["submitlog"] = LogFile(
        app.config["DATA_FILE"], timestamps=app.config["TIMESTAMPS"]
    )

    # OPTIONS is either answered by preflight() or refused with 405
    app.add_url_rule(
        "/submit", view_func=submit, methods=["POST"],
        provide_automatic_options=False,
    )
    if app.config["DATA_ENDPOINT"]:
        app.add_url_rule(
            "/data", view_func=data, methods=["GET"],
            provide_automatic_options=False,
        )
    app.register_error_handler(HTTPException, http_error)

    methods = allowed_methods(app.config)
    cors_headers = {
        "Access-Control-Allow-Origin": "*",
        "Access-Control-Allow-Methods": ", ".join(methods),
        "Access-Control-Allow-Headers": "Content-Type",
    }

    @app.before_request
    def preflight():
        if request.method == "OPTIONS" and current_app.config["PREFLIGHT"]:
            return Response(status=204)

    # registered before CORS() so it runs last and pins the final values
    @app.after_request
    def fixed_cors_headers(response):
        for name, value in cors_headers.items():
            response.headers[name] = value
        return response

    CORS(
        app,
        origins="*",
        methods=methods,
        allow_headers=["Content-Type"],
        send_wildcard=True,
        automatic_options=False,
    )

    return app
