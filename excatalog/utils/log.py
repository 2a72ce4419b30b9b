import logging
import os
import sys

LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG").upper()
FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

noisy_loggers = [
    "botocore",
    "boto3",
    "urllib3",
    "s3transfer",
]

for name in noisy_loggers:
    logging.getLogger(name).setLevel(logging.INFO)

# force=True replaces any handlers already on the root logger
logging.basicConfig(level=LOG_LEVEL, format=FORMAT, stream=sys.stdout, force=True)

logger = logging.getLogger("excatalog")
logger.setLevel(LOG_LEVEL)
logger.propagate = True

logger.debug(f"Logger initialised level={LOG_LEVEL}")
