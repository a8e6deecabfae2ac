# setup.py
"""Setup script for the Blurhash Tool."""

import os

from setuptools import setup, find_packages

setup(
    name="blurhash-tool",
    version="0.1.0",
    description="Batch blurhash generation for folders of images",
    long_description=open("README.md").read() if os.path.exists("README.md") else "",
    long_description_content_type="text/markdown",
    author="Blurhash Tool Team",
    packages=find_packages(),
    python_requires=">=3.8",
    install_requires=[
        "Pillow>=9.1.0",
        "blurhash-python>=1.2.0",
        "tqdm>=4.50.0",
    ],
    extras_require={
        "test": [
            "pytest>=6.0.0",
            "pytest-cov>=2.10.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "blurhash-tool=blurhash_tool.main:main",
        ],
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Topic :: Multimedia :: Graphics",
    ],
)
