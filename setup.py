"""
setup.py for symphony-client.
"""
from setuptools import setup, find_packages

setup(
    name="symphony-client",
    version="0.1.0",
    description="Session-managed client for the Symphony pod REST API",
    packages=find_packages(include=["symphony_client", "symphony_client.*"]),
    python_requires=">=3.11",
    install_requires=[
        "requests>=2.31",
        "pydantic>=2.5",
        "python-dotenv>=1.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.4",
        ],
    },
)
