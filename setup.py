"""Setup script for the project."""

from setuptools import setup, find_packages

setup(
    name="ai-fitness-planner",
    version="1.0.0",
    description="AI Fitness Planner: weekly workout and daily diet plans from a user profile",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "fastapi>=0.110",
        "uvicorn>=0.27",
        "pydantic>=2.5",
        "pydantic-settings>=2.1",
        "langchain-core>=0.2",
        "langchain-google-genai>=1.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.4",
            "pytest-asyncio>=0.23",
            "httpx>=0.25",
        ],
    },
    python_requires=">=3.10",
)
