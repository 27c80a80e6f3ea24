# solochess/debug.py
import logging
import sys
import os
from datetime import datetime

LOGGERS = {
    'generator': logging.getLogger('generator'),
    'tree': logging.getLogger('tree'),
    'placement': logging.getLogger('placement'),
    'board': logging.getLogger('board')
}

def setup_logging(args, log_dir='logs'):
    """
    Configures all loggers. INFO goes to console, DEBUG (if flagged) goes to file.
    Returns the debug log path, or None when no debug flag is set.
    """
    root_logger = logging.getLogger()
    if root_logger.hasHandlers():
        root_logger.handlers.clear()

    # Let all messages flow up to the root logger
    root_logger.setLevel(logging.DEBUG)

    # Console Handler (displays INFO and above); stderr keeps stdout clean for FEN output
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(logging.Formatter('%(asctime)s - %(message)s'))
    console_handler.setLevel(logging.INFO)
    root_logger.addHandler(console_handler)

    # File Handler (writes DEBUG and above if any debug flag is set)
    has_debug_flags = any(getattr(args, f"debug_{name}", False) for name in LOGGERS)
    if not has_debug_flags:
        return None

    if not os.path.exists(log_dir):
        os.makedirs(log_dir)
    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    log_filename = os.path.join(log_dir, f"debug_{timestamp}.log")
    file_handler = logging.FileHandler(log_filename, mode='w')
    file_handler.setFormatter(logging.Formatter('%(asctime)s - %(name)-10s - %(levelname)-8s - %(message)s'))
    file_handler.setLevel(logging.DEBUG)

    # This filter will control which logger's messages get written to the file
    class DebugFlagFilter(logging.Filter):
        def filter(self, record):
            for name in LOGGERS:
                if record.name.startswith(name) and getattr(args, f"debug_{name}", False):
                    return True
            return False

    file_handler.addFilter(DebugFlagFilter())
    root_logger.addHandler(file_handler)
    return log_filename

def add_debug_arguments(parser):
    """Registers one --debug-<name> switch per module logger."""
    for name in LOGGERS:
        parser.add_argument(f'--debug-{name}', action='store_true', help=f'Enable DEBUG logging for the {name} module.')
