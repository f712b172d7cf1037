from setuptools import setup, find_packages

setup(
    name="chemion_designer",
    version="0.1.0",
    packages=find_packages(exclude=["tests", "tests.*", "examples"]),
    install_requires=[
        "httpx>=0.27.0",
        "rich>=13.7.0"
    ],
    extras_require={
        "test": [
            "pytest>=7.0",
            "pytest-asyncio>=0.23"
        ]
    }
)
