from importlib.metadata import PackageNotFoundError, version

try:
    version = version("credini")
except PackageNotFoundError:
    version = "0.0.0"
