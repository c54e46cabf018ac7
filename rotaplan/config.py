# -*- coding: utf-8 -*-
"""
Конфигурация генерации. Все ключевые параметры вынесены сюда.
"""

CONFIG = {
    # Правило ротации: рабочий день, затем отдых до набора квоты
    "rotation": {
        "rest_days": 2,             # сколько дней отдыха подряд перед выходом на работу
        "weekend_days": [6, 7],     # ISO: 6 = суббота, 7 = воскресенье; всегда отдых
        # Старый перенос между месяцами: состояние выводится из хвоста месяца
        # (число дней отдыха подряд в конце). По умолчанию передаём состояние целиком.
        "legacy_carry_over": False,
    },

    # Вывод в терминал
    "output": {
        "color": True,              # подсветка рабочих дней (ANSI)
        "separator_width": 50,      # ширина разделителя между месяцами
        "show_usage": True,         # баннер с примерами запуска в конце
    },

    # Логирование (loguru)
    "logging": {
        "level": "INFO",
        "file": None,               # например "logs/rotaplan.log"
    },
}
