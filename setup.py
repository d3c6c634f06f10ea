from setuptools import setup

with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

setup(
    name="collection-adapters",
    version="0.1.0",
    description="Lazy sliding window and chain adapters over collections, with random access, reverse, and forward traversal inherited from their bases.",
    packages=["collection_adapters", "collection_adapters._src"],
    python_requires=">=3.9",
    extras_require={"test": ["pytest"]},
    long_description = long_description,
    long_description_content_type = "text/markdown",
    classifiers=[
        "Programming Language :: Python :: 3.9",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
)
