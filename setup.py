from setuptools import setup, find_packages

setup(
    name="article_reader",
    version="0.1.0",
    packages=find_packages(exclude=["tests", "tests.*"]),
    package_data={"article_reader": ["config.yaml"]},
    install_requires=[
        "scrapy",
        "parsel",
        "lxml",
        "python-dateutil",
        "pydantic",
        "pyyaml",
        "python-dotenv",
        "rich",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "article-reader=article_reader.reader_routine:main",
        ],
    },
    python_requires=">=3.9",
)
