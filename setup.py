# setup.py
"""Setup script for n8n-codegen."""

from setuptools import setup, find_packages

setup(
    name="n8n-codegen",
    version="1.0.0",
    description="Convert n8n workflows into standalone Node.js code",
    packages=find_packages(include=["n8n_codegen", "n8n_codegen.*"]),
    include_package_data=True,
    package_data={
        "n8n_codegen.generator": ["templates/*.j2"],
    },
    install_requires=[
        "click>=8.0",
        "pyyaml>=6.0",
        "httpx>=0.24",
        "jinja2>=3.0",
        "pydantic>=2.0",
        "pydantic-settings>=2.0",
        "structlog>=23.0",
    ],
    extras_require={
        "dev": [
            "pytest>=7.0",
            "pytest-asyncio>=0.21",
            "black>=23.0",
            "flake8>=6.0",
        ]
    },
    entry_points={
        "console_scripts": [
            "n8n-codegen=n8n_codegen.cli.main:cli",
        ],
    },
    python_requires=">=3.8",
)
