"""Install the NU WebSSO session package."""

from setuptools import setup, find_packages

setup(
    name='nusso',
    version='0.1.0',
    packages=find_packages(include=['nusso', 'nusso.*'],
                           exclude=['*test*']),
    python_requires='>=3.8',
    install_requires=[
        "requests",
        "flask",
        "werkzeug",
        "python-json-logger",
    ],
    extras_require={
        "test": [
            "pytest",
            "hypothesis",
        ],
    },
    zip_safe=False
)
