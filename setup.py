from setuptools import setup, find_packages

setup(
    name="lrcparse",
    version="0.1.0",
    description="Parse LRC lyric files into metadata and millisecond-timed lyric items",
    long_description=open("README.md", encoding="utf-8").read(),
    long_description_content_type="text/markdown",
    python_requires=">=3.10",
    license="MIT",
    packages=find_packages(include=["lrcparse", "lrcparse.*"]),
    package_data={"lrcparse": ["py.typed"]},
    install_requires=[
        "colorama>=0.4.6",
        "regex",
        "typer",
    ],
    extras_require={
        "dev": [
            "pytest",
            "black",
            "ruff",
            "mypy",
        ]
    },
    entry_points={
        "console_scripts": [
            "lrcparse=lrcparse.cli:main",
        ]
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Topic :: Multimedia :: Sound/Audio",
        "Topic :: Text Processing",
    ],
    keywords="lyrics lrc parser synchronized",
)
