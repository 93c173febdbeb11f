"""PySide6 front end for Android setup."""
