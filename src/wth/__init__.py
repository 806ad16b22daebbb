"""wth: terminal weather lookup backed by OpenWeatherMap."""

__version__ = "0.1.0"
