import os

BASE_DIR = os.path.dirname(os.path.abspath(__file__))

SECRET_KEY = os.getenv("SECRET_KEY")

# The todo collection lives next to the code, not wherever the process was started
TODOS_DATA_FILE = os.path.join(BASE_DIR, "app", "db", "data.json")

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
