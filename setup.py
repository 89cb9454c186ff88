"""Setup script for the project."""

from setuptools import setup, find_packages

setup(
    name="exercise-tracker",
    version="1.0.0",
    description="Exercise tracking REST API backed by MongoDB",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "fastapi>=0.110",
        "uvicorn[standard]>=0.27",
        "pydantic>=2.5",
        "pydantic-settings>=2.1",
        "motor>=3.3",
        "pymongo>=4.6",
        "python-multipart>=0.0.9",
    ],
    extras_require={
        "test": [
            "pytest>=8.0",
            "httpx>=0.27",
            "mongomock-motor>=0.0.29",
        ],
    },
    python_requires=">=3.11",
)
