from setuptools import setup, find_namespace_packages

setup(
    name="topic_catalog",
    version="0.1.0",
    description="REST API for managing books and the topics they belong to",
    packages=find_namespace_packages(include=['api*', 'cli*', 'core*']),
    include_package_data=True,
    python_requires=">=3.11",
    install_requires=[
        "fastapi",
        "uvicorn",
        "SQLAlchemy>=2.0",
        "pydantic>=2.0",
        "pydantic-settings",
        "Click",
    ],
    extras_require={
        "test": [
            "pytest",
            "httpx",
        ],
    },
    entry_points={
        "console_scripts": [
            "catalog=cli.main:main",
        ],
    },
)
