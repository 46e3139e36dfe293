from setuptools import setup, find_packages

setup(
    name="uextract",
    version="1.0.0",
    description="Export objects from game asset archives as JSON documents or images",
    author="Jacob",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "pillow",
        "numpy",
        "rarfile",
        "py7zr",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "uextract=uextract.cli:main",
        ],
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Topic :: Games/Entertainment",
        "Topic :: Multimedia :: Graphics :: Graphics Conversion",
    ],
    python_requires=">=3.9",
)
