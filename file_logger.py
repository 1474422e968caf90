import logging
import json
from datetime import datetime, timezone
from config import TRACE_LOG_PATH

# Configure logger
logger = logging.getLogger('trace_logger')
logger.setLevel(logging.INFO)

# Create a file handler to write catalog mutations to the trace log
handler = logging.FileHandler(TRACE_LOG_PATH, delay=True)
handler.setLevel(logging.INFO)

# Create a JSON formatter
formatter = logging.Formatter('%(message)s')
handler.setFormatter(formatter)

# Add the handler to the logger, ensuring it's only added once
if not logger.handlers:
    logger.addHandler(handler)

def log_trace(action: str, product_id: str, **details):
    """Logs a catalog mutation to the trace file as one JSON line."""
    trace_data = {
        "datetime": datetime.now(timezone.utc).isoformat(),
        "action": action,
        "product_id": product_id,
    }
    trace_data.update(details)
    logger.info(json.dumps(trace_data))
