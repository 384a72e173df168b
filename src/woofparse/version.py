from importlib.metadata import PackageNotFoundError, version

try:
    version = version("woofparse")
except PackageNotFoundError:
    version = "0.0.0"
