"""
The VIEW layer: PySide6 widgets. Imported lazily so the console front end
works without a display.
"""
