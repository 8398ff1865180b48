"""
Setup script for the layerconf package.
"""

from setuptools import setup, find_packages

setup(
    name="layerconf",
    version="1.0.0",
    description="Layered configuration values with typed accessors and first-match-wins chaining",
    author="layerconf developers",
    packages=find_packages(include=["layerconf", "layerconf.*"]),
    python_requires=">=3.8",
    install_requires=[
        # File sources
        "PyYAML>=6.0",
        "python-dotenv>=1.0.0",

        # RFC 3339 timestamps
        "python-dateutil>=2.8.0",
    ],
    extras_require={
        "dev": [
            "pytest>=7.4.0",
            "pytest-cov>=4.1.0",
            "black>=23.0.0",
            "flake8>=6.0.0",
        ],
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
    ],
)
