"""
Installs SciDist
"""

import re

from setuptools import find_packages, setup


# Get package information
def get_package_info():
    """
    Gets version information for the installation.
    """
    # Set up variables
    package_version = None

    # Open the file containing version info
    with open("scidist/__init__.py", "r", encoding="utf-8") as file:
        for line in file:
            # Check version
            if match_obj := re.match(r"__version__.+([0-9]+\.[0-9]+\.[0-9]+)", line):
                package_version = match_obj.group(1)

    # Checks on variables
    if package_version is None:
        raise IOError("Could not find information on version.")

    return package_version


# Run setup
setup(
    name="scidist",
    version=get_package_info(),
    description=(
        "Gamma, Beta, and LogNormal distributions with exact variate samplers "
        "and consistent handling of degenerate parameters"
    ),
    license="MIT",
    python_requires=">=3.10",
    packages=find_packages(include=["scidist", "scidist.*"]),
    install_requires=[
        "numpy>=1.25",
        "scipy>=1.10",
        "torch>=2.0",
        "typeguard>=4.0",
    ],
    extras_require={"test": ["pytest>=7.0"]},
)
