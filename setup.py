"""Setup configuration for iot-manager."""

from setuptools import setup, find_packages

setup(
    name="iot-manager",
    version="0.1.0",
    description="Validate, version, diff and simulate smart-home scenario notes",
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.11",
    install_requires=[
        "pyyaml>=6.0",
        "click>=8.2.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.4.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "iot-manager=iot_manager.cli:main",
        ],
    },
)
