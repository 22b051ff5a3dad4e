# setup.py

from setuptools import setup, find_packages

setup(
    name='nginxunescape',
    version='0.1.0',
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.10",
    install_requires=[
        "click",
        "rich",
        "ujson",
        "python-dotenv",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        'console_scripts': [
            'nginx-unescape=nginxunescape:main',
        ],
    },
)
