import logging

import uvicorn

from mealboard.api.api_run import app
from mealboard.utilities.config import APP_HOST, APP_PORT, DEBUG, LOG_LEVEL, STORE_BACKEND


def main():
    logging.basicConfig(
        level=logging.DEBUG if DEBUG else LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logging.getLogger("mealboard_app").info(
        "Meal board on http://localhost:%s (store backend: %s)", APP_PORT, STORE_BACKEND
    )
    uvicorn.run(app, host=APP_HOST, port=APP_PORT)


if __name__ == "__main__":
    main()
