"""Package metadata for outlook_exe."""

__app_name__ = "outlook-exe"
__version__ = "0.3.0"
__description__ = "Compose and launch Microsoft Outlook messages from the command line."
__author__ = "outlook-exe contributors"
__license_type__ = "MIT"

__all__ = [
    "__app_name__",
    "__author__",
    "__description__",
    "__license_type__",
    "__version__",
]
