from setuptools import setup, find_packages

setup(
    name="easycopy",
    version="2.0.0",
    description="Flatten a GitHub repo or local directory into a single static HTML page for fast skimming and Ctrl+F",
    long_description=open("README.md", encoding="utf-8").read(),
    long_description_content_type="text/markdown",
    license="0BSD",
    python_requires=">=3.10",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "markdown>=3.8.2",
        "pygments>=2.19.2",
        "mcp>=1.0.0,<2",
        "tqdm>=4.66",
    ],
    extras_require={
        "test": ["pytest>=8"],
    },
    entry_points={
        "console_scripts": [
            "easycopy=easycopy.cli:main",
            "easycopy-mcp=easycopy.mcp_server:main",
        ],
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Programming Language :: Python :: 3.13",
        "Topic :: Utilities",
    ],
)
