from setuptools import setup, find_packages

setup(
    name="memscope",
    version="0.1.0",
    packages=find_packages(exclude=["tests", "tests.*"]),
    entry_points={
        'console_scripts': [
            'memscope=memscope.cli:main',
        ],
    },
    install_requires=[
        "pyelftools>=0.33",
    ],
    extras_require={
        "test": [
            "pytest>=7.0",
        ],
    },
    python_requires=">=3.8",
    author="memscope",
    description="ELF decoding and memory region analysis for embedded firmware builds",
)
