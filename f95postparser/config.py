import os

from dotenv import load_dotenv

# --- Constants ---
ENV_FILE_PATH = os.getenv("F95_ENV_FILE", "f95.env")

# Values already set in the environment win over the env file
load_dotenv(ENV_FILE_PATH, override=False)

LOG_FILE_PATH = os.getenv("LOG_FILE_PATH", "")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
HTML_PARSER = os.getenv("HTML_PARSER", "html.parser")
