# Цвета (hex без '#': так их понимают и openpyxl, и QColor после добавления '#')
GREEN = "C6EFCE"
RED = "FFC7CE"
BLUE = "9DC3E6"
WHITE = "FFFFFF"
BLACK = "000000"
TEXT = "000000"
YELLOW = "FFF2CC"
GREY = "595959"


# Правило безопасности: шаг между соседними уровнями
MIN_STEP = 1
MAX_STEP = 3

# Уровни читаются как беззнаковые 32-битные
MAX_LEVEL = 4_294_967_295


# Допуск (сколько элементов можно выбросить)
CLI_DEFAULT_TOLERANCES = (0, 1)
MAX_TOLERANCE_UI = 10


# Размеры
INFO_COL_WIDTH = 160
LEVEL_COL_WIDTH = 48


# Шрифты
EXPORT_FONT_PT = 11.0
UI_FONT_PT = 10.0


LOG_FORMAT = "%(asctime)s [%(levelname)s] %(message)s"
