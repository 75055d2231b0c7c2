# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

import os

from flask import Flask
from flask_cors import CORS

from todo_api.container import Container
from todo_api.shared.config import AppConfig, load_config
from todo_api.shared.logging import logger, setup_logging
from todo_api.shared.middleware.error_handler import configure_error_handling
from todo_api.shared.middleware.request_logger import configure_request_logging


def create_app(config: AppConfig | None = None, container: Container | None = None) -> Flask:
    config = config or load_config()
    container = container or Container(config)
    setup_logging(
        level="DEBUG" if config.debug_logging else config.log_level,
        log_file=config.log_file,
    )

    app = Flask(__name__)
    configure_error_handling(app, config)
    configure_request_logging(app, config)

    CORS(app, resources={r"/*": {"origins": config.origins()}})
    app.register_blueprint(container.misc_controller.as_blueprint())
    app.register_blueprint(container.users_controller.as_blueprint())
    app.register_blueprint(container.todos_controller.as_blueprint())

    @app.after_request
    def _add_security_headers(resp):
        resp.headers.setdefault("X-Content-Type-Options", "nosniff")
        resp.headers.setdefault("Referrer-Policy", "no-referrer")
        return resp

    logger.info(
        f"Flask app initialized (env={config.app_env}, free_todo_limit={config.free_todo_limit})"
    )
    return app


def main() -> None:
    port = int(os.environ.get("PORT", "3333"))
    create_app().run(host="0.0.0.0", port=port, debug=not load_config().is_production())


if __name__ == "__main__":
    main()
