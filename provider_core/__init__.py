"""Provider Core

A uniform contract over heterogeneous language-model backends, with
round-robin credential rotation and knowledge-base prompt augmentation.
"""

from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

try:
    from importlib.metadata import PackageNotFoundError, version

    __version__ = version("provider-core")
except PackageNotFoundError:
    __version__ = "0.1.0"
__author__ = "Provider Core"
