import os

from setuptools import find_packages, setup

setup(
    name="unidto",
    version="0.1.0",
    packages=find_packages(include=["unidto", "unidto.*"]),
    python_requires=">=3.11",
    install_requires=[
        "pydantic>=2.10.6,<3.0.0",
    ],
    extras_require={
        "test": [
            "pytest>=8.0",
            "hypothesis>=6.100",
        ],
    },
    author="unidto Contributors",
    description="Declarative request schemas and validation for an academic administration API",
    long_description=open("README.md").read() if os.path.exists("README.md") else "",
    long_description_content_type="text/markdown",
)
