#!/usr/bin/env python

from setuptools import setup

setup(
    name="collector-storage",
    version="0.1.0",
    description="Elasticsearch schema installer for the APM collector storage",
    packages=["collector_storage"],
    include_package_data=True,
    zip_safe=False,
    keywords=["elasticsearch", "apm", "collector"],
    classifiers=[
        "Intended Audience :: Developers",
        "Topic :: System :: Monitoring",
    ],
    python_requires=">=3.11",
    install_requires=[
        "elasticsearch~=8.6",
        "python-dotenv",
        "class-doc",
        "pydantic>=2",
        "pydantic-settings",
    ],
    extras_require={
        'dev': [
            'pytest',
            'mypy',
            'flake8',
        ]
    },
    entry_points={
        'console_scripts': [
            'collector-storage = collector_storage.__main__:main'
        ]
    },
)
