"""Setup configuration for browser-json-reporter."""

from setuptools import setup, find_packages

setup(
    name="browser-json-reporter",
    version="0.1.0",
    description="JSON test reports for browser test runners",
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.9",
    install_requires=[
        "pyyaml>=6.0",
        "click>=8.1.0",
        "pytest>=7.0",
    ],
    entry_points={
        "console_scripts": [
            "browser-json-reporter=browser_json_reporter.cli:main",
        ],
        "pytest11": [
            "json_reporter=browser_json_reporter.plugin",
        ],
    },
)
