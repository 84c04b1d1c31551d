__title__ = "httpenvelope"
__description__ = "Send one HTTP request from the command line, get JSON back."
__version__ = "0.1.0"
