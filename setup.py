"""
Setup script for Compass View application.
"""

from setuptools import setup, find_namespace_packages
import os

# Read the README file
def read_readme():
    readme_path = os.path.join(os.path.dirname(__file__), 'README.md')
    if os.path.exists(readme_path):
        with open(readme_path, 'r', encoding='utf-8') as f:
            return f.read()
    return "Compass dial widget for PySide6"

# Read requirements
def read_requirements():
    req_path = os.path.join(os.path.dirname(__file__), 'requirements.txt')
    if os.path.exists(req_path):
        with open(req_path, 'r') as f:
            return [line.strip() for line in f if line.strip() and not line.startswith('#')]
    return []

setup(
    name="compass-view",
    version="0.1.0",
    author="Compass View Team",
    description="Compass dial widget that rotates according to a bearing",
    long_description=read_readme(),
    long_description_content_type="text/markdown",
    packages=find_namespace_packages(include=["gui", "gui.*", "utils", "utils.*"]),
    py_modules=["main", "version"],
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "Topic :: Software Development :: User Interfaces",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
    python_requires=">=3.9",
    install_requires=read_requirements(),
    extras_require={
        "dev": [
            "pytest>=7.0.0",
            "black>=22.0.0",
            "flake8>=4.0.0",
        ]
    },
    entry_points={
        "console_scripts": [
            "compass-view=main:main",
        ],
    },
    keywords="compass, bearing, widget, qt, pyside6, gui",
)
