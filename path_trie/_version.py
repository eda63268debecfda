import os

version = None

if version is None:
    # When installed with pip - Fetch version from the package metadata
    try:
        from importlib.metadata import version as get_distribution_version

        version = get_distribution_version("path-trie")
    except Exception:  # noqa: S110
        pass

if version is None:
    # When running directly from the SCM repo - Fetch version with setuptools_scm
    try:
        from setuptools_scm import get_version

        version = get_version()
    except Exception:  # noqa: S110
        pass

if version is None:
    # When version.txt file is available - use that
    try:
        with open(os.path.join(os.path.dirname(__file__), "version.txt")) as fh:
            version = fh.read().strip()
    except Exception:  # noqa: S110
        pass

if version is None:
    version = "0.0.0"
