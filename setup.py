from setuptools import setup, find_packages

setup(
    name="hostfacts",
    version="0.1.0",
    packages=find_packages(exclude=["tests", "tests.*"]),
    description="Print OS, kernel, uptime, shell, display, CPU, GPU and memory facts for the local host.",
    long_description=open("README.md", encoding="utf-8").read(),
    long_description_content_type="text/markdown",
    install_requires=[
        "rich",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "hostfacts=hostfacts.cli:main",
        ],
    },
    python_requires=">=3.8",
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: POSIX :: Linux",
    ],
)
