from setuptools import setup, find_packages
from pathlib import Path

this_directory = Path(__file__).parent
long_description = (this_directory / "README.md").read_text(encoding="utf-8")

setup(
    name="molcat",
    version="1.0.0",
    description="Readers for the JPL and COLOGNE (CDMS) molecular spectroscopy line catalogs",
    long_description=long_description,
    long_description_content_type="text/markdown",  # important for Markdown rendering
    packages=find_packages(include=["molcat", "molcat.*"]),
    install_requires=[
      'numpy',
    ],
    extras_require={
      'test': ['pytest'],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: GNU General Public License v3 (GPLv3)",
        "Operating System :: OS Independent",
    ],
    python_requires='>=3.10',
)
