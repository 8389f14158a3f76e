"""
Setup script for Drush
"""
from setuptools import setup, find_packages

with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

# --------------------------------------------------------------------------
# Optional dependency groups
# Upper bounds on major versions prevent unexpected breaking changes.
# --------------------------------------------------------------------------
_test_deps = [
    "pytest>=7.0.0,<9",
]

setup(
    name="drush-core",
    version="9.7.2",
    author="Drush contributors",
    description="Drush core - service facade, bootstrap and command runner",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(include=["drush", "drush.*"]),
    package_data={"drush": ["drush.info"]},
    python_requires=">=3.10",
    install_requires=[
        "click>=8.0.0,<9",
        "rich>=13.0.0,<15",
        "python-dotenv>=1.0.0,<2",
    ],
    extras_require={
        "test": _test_deps,
    },
    entry_points={
        "console_scripts": [
            "drush=drush.cli.main:main",
        ],
    },
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "Environment :: Console",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
    ],
)
