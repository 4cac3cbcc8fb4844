import uvicorn
from kitchen.api.api_run import app
from kitchen.utilities.config import APP_HOST, APP_PORT, LOG_LEVEL
from kitchen.utilities.logging_setup import configure_logging


if __name__ == "__main__":
    configure_logging(LOG_LEVEL)
    # Print a friendly message that points to the URL you can open in a browser
    print(f"Kitchen Assistant API on http://{APP_HOST}:{APP_PORT}/docs (Press CTRL+C to quit)")
    uvicorn.run(app, host=APP_HOST, port=APP_PORT)
