import sys
import logging
from loguru import logger


# ===========================
# Log Contexts Configuration
# ===========================
CONTEXTS = {
    "APP": {"color": "green", "icon": "🚀"},
    "API": {"color": "cyan", "icon": "🔗"},
    "QUERY": {"color": "yellow", "icon": "🔎"},
    "SCRAPER": {"color": "blue", "icon": "🌐"},
    "HTTP": {"color": "magenta", "icon": "📡"},
}


# ===========================
# Log Level Icons
# ===========================
LEVEL_ICONS = {
    "DEBUG": "🔍",
    "INFO": "ℹ️ ",
    "ERROR": "❌",
}


# ===========================
# Log Formatter
# ===========================
def format_log(record):
    context = record["extra"].get("context", "APP")
    context_data = CONTEXTS.get(context, {"color": "white", "icon": "📦"})
    context_color = context_data["color"]
    context_icon = context_data["icon"]
    level_icon = LEVEL_ICONS.get(record["level"].name, "")

    return (
        "<white>{time:YYYY-MM-DD}</white> "
        "<magenta>{time:HH:mm:ss}</magenta> | "
        f"<level>{level_icon} {{level: <8}}</level> | "
        f"<{context_color}>{context_icon} {{extra[context]: <8}}</{context_color}> | "
        "<level>{message}</level>\n"
        "{exception}"
    )


# ===========================
# Logger Setup Function
# ===========================
def setup_logger(level: str = "INFO"):
    logger.remove()
    logger.configure(extra={"context": "APP"})

    logger.add(
        sys.stderr,
        level=level,
        format=format_log,
        colorize=True,
        backtrace=True,
        diagnose=False,
    )


# ===========================
# Logger Factory
# ===========================
def get_logger(context: str):
    return logger.bind(context=context)


# ===========================
# Logger Instances
# ===========================
app_logger = get_logger("APP")
api_logger = get_logger("API")
query_logger = get_logger("QUERY")
scraper_logger = get_logger("SCRAPER")
http_logger = get_logger("HTTP")


# ===========================
# External Loggers Suppression
# ===========================
logging.getLogger("uvicorn.access").disabled = True
logging.getLogger("uvicorn.error").setLevel(logging.CRITICAL)
logging.getLogger("fastapi").setLevel(logging.CRITICAL)
logging.getLogger("httpx").setLevel(logging.WARNING)
