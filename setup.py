from setuptools import setup, find_namespace_packages

setup(
    name="book_catalog",
    version="0.1.0",
    packages=find_namespace_packages(include=['api*', 'catalog*', 'cli*']),
    include_package_data=True,
    python_requires=">=3.11",
    install_requires=[
        "Click",
        "SQLAlchemy>=2.0",
        "pydantic>=2",
        "fastapi",
        "alembic",
    ],
    extras_require={
        "test": [
            "pytest",
            "httpx",
        ],
    },
    entry_points={
        "console_scripts": [
            "book-catalog=cli.main:main",
        ],
    },
)
