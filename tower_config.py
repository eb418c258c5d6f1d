
CONFIG = {
    "CELL_SIZE": 32,
    "FPS": 60,
    "SEED": None,
    "TOUCH_CONTROLS": False,
    "TOUCH_STRIP_H": 160,
    "LOG_LEVEL": "WARNING",
}
