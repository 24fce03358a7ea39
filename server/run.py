import atexit

from config import Config
from server.eazepark.app import create_app, setup_logging
from server.eazepark.extensions import close_database

setup_logging(Config.LOG_LEVEL)

application = create_app()
atexit.register(close_database, application)

if __name__ == "__main__":
    application.run(host='0.0.0.0', port=Config.PORT)
