from utils.logger import logger
from utils.screenshot import take_screenshot
from utils.wait_helper import FluentWait, wait_for

__all__ = [
    "logger",
    "take_screenshot",
    "wait_for",
    "FluentWait",
]
