import json
import sys
from datetime import datetime
from typing import Optional, TextIO
from enum import Enum

class LogLevel(Enum):
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    SUCCESS = "SUCCESS"

class Colors:
    """ANSI color codes for console output"""
    RESET = '\033[0m'
    BOLD = '\033[1m'
    DIM = '\033[2m'

    BRIGHT_BLACK = '\033[90m'
    BRIGHT_RED = '\033[91m'
    BRIGHT_GREEN = '\033[92m'
    BRIGHT_YELLOW = '\033[93m'
    BRIGHT_BLUE = '\033[94m'
    BRIGHT_CYAN = '\033[96m'
    WHITE = '\033[37m'

# Levels routed to stderr; everything else is progress output on stdout
ERROR_LEVELS = (LogLevel.WARNING, LogLevel.ERROR)

class MenuLogger:
    """Console logger for the maintenance scripts with colorized, consistent formatting"""

    def __init__(self, service_name: str = "MENU", enable_colors: Optional[bool] = None):
        self.service_name = service_name.upper()
        if enable_colors is None:
            from menu_maintenance.core.config import settings
            enable_colors = settings.LOG_COLORS
        self.enable_colors = enable_colors

        self.level_colors = {
            LogLevel.DEBUG: Colors.BRIGHT_CYAN,
            LogLevel.INFO: Colors.BRIGHT_BLUE,
            LogLevel.WARNING: Colors.BRIGHT_YELLOW,
            LogLevel.ERROR: Colors.BRIGHT_RED,
            LogLevel.SUCCESS: Colors.BRIGHT_GREEN,
        }

        self.level_emojis = {
            LogLevel.DEBUG: "🔍",
            LogLevel.INFO: "ℹ️",
            LogLevel.WARNING: "⚠️",
            LogLevel.ERROR: "❌",
            LogLevel.SUCCESS: "✅",
        }

    def _get_timestamp(self) -> str:
        return datetime.now().strftime("%H:%M:%S.%f")[:-3]

    def _colorize(self, text: str, color: str) -> str:
        if not self.enable_colors:
            return text
        return f"{color}{text}{Colors.RESET}"

    def _service_text(self, context: Optional[str]) -> str:
        service_context = self.service_name
        if context:
            service_context += f"/{context.upper()}"
        return self._colorize(f"[{service_context}]", Colors.BRIGHT_BLACK)

    def _format_message(self, level: LogLevel, message: str, context: Optional[str] = None) -> str:
        """Format: [TIMESTAMP] emoji [SERVICE/CONTEXT] [LEVEL] Message"""
        emoji = self.level_emojis.get(level, "")
        level_color = self.level_colors.get(level, Colors.WHITE)

        level_text = self._colorize(f"[{level.value}]", level_color + Colors.BOLD)
        timestamp_text = self._colorize(f"[{self._get_timestamp()}]", Colors.DIM)

        return f"{timestamp_text} {emoji} {self._service_text(context)} {level_text} {message}"

    def _stream_for(self, level: LogLevel) -> TextIO:
        return sys.stderr if level in ERROR_LEVELS else sys.stdout

    def _log(self, level: LogLevel, message: str, context: Optional[str] = None, **kwargs):
        formatted_message = self._format_message(level, message, context)

        if kwargs:
            extras = []
            for key, value in kwargs.items():
                if isinstance(value, (dict, list)):
                    value_str = json.dumps(value, indent=None, separators=(',', ':'), default=str)[:100]
                    if len(str(value)) > 100:
                        value_str += "..."
                else:
                    value_str = str(value)
                extras.append(f"{key}={value_str}")

            formatted_message += self._colorize(f" | {', '.join(extras)}", Colors.DIM)

        stream = self._stream_for(level)
        print(formatted_message, file=stream)
        stream.flush()

    def debug(self, message: str, context: Optional[str] = None, **kwargs):
        self._log(LogLevel.DEBUG, message, context, **kwargs)

    def info(self, message: str, context: Optional[str] = None, **kwargs):
        self._log(LogLevel.INFO, message, context, **kwargs)

    def warning(self, message: str, context: Optional[str] = None, **kwargs):
        self._log(LogLevel.WARNING, message, context, **kwargs)

    def error(self, message: str, context: Optional[str] = None, **kwargs):
        self._log(LogLevel.ERROR, message, context, **kwargs)

    def success(self, message: str, context: Optional[str] = None, **kwargs):
        self._log(LogLevel.SUCCESS, message, context, **kwargs)

    def banner(self, message: str, context: Optional[str] = None, char: str = "═", width: int = 60):
        """Print a banner with message"""
        content = f" {message} "
        content_length = len(content)
        if content_length >= width - 4:
            banner_content = content
        else:
            padding = (width - content_length) // 2
            banner_content = char * padding + content + char * (width - content_length - padding)

        colored_banner = self._colorize(banner_content, Colors.BRIGHT_CYAN + Colors.BOLD)
        timestamp_text = self._colorize(f"[{self._get_timestamp()}]", Colors.DIM)

        print(f"{timestamp_text} {self._service_text(context)} {colored_banner}", file=sys.stdout)
        sys.stdout.flush()

    def section_start(self, section_name: str, context: Optional[str] = None):
        self.banner(f"🚀 {section_name.upper()} STARTED", context, "═", 50)

    def section_end(self, section_name: str, context: Optional[str] = None, success: bool = True):
        status_emoji = "✅" if success else "❌"
        status_text = "COMPLETED" if success else "FAILED"
        self.banner(f"{status_emoji} {section_name.upper()} {status_text}", context, "═", 50)


# Global logger instances for the maintenance procedures
menu_logger = MenuLogger("MENU")
reorg_logger = MenuLogger("REORG")
db_logger = MenuLogger("DATABASE")
