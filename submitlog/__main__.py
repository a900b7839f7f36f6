import logging
import sys

from submitlog import config
from submitlog.app import create_app


def main():
    settings = config.load()
    # before create_app() so Flask does not attach its own handler
    logging.basicConfig(
        level=settings["LOG_LEVEL"],
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    app = create_app(**settings)
    host = app.config["HOST"]
    port = app.config["PORT"]
    app.logger.info("listening on %s:%s", host, port)
    try:
        app.run(host=host, port=port)
    except SystemExit as e:
        # werkzeug reports a failed bind itself and exits 1
        if not e.code:
            raise
        app.logger.error("could not listen on %s:%s", host, port)
        raise
    except OSError as e:
        app.logger.error("could not listen on %s:%s: %s", host, port, e)
        sys.exit(1)


if __name__ == "__main__":
    main()
