"""Video Grid web app"""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("video-grid")
except PackageNotFoundError:
    __version__ = "dev"
