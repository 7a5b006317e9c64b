# -*- coding: utf-8 -*-
from setuptools import find_packages, setup

setup(
    name="bigip-ltm",
    version="0.1",
    description="Declarative lifecycle management of BIG-IP LTM nodes.",
    author="BIG-IP Automation Team",
    install_requires=[
        "docopt==0.6.2",
        "pyyaml==6.0.2",
        "requests==2.32.4",
    ],
    extras_require={
        "test": [
            "mock",
            "pytest",
        ],
    },
    zip_safe=False,
    include_package_data=True,
    package_data={"rest.common.config": ["config.json"]},
    packages=find_packages(include=["bigip", "bigip.*", "rest", "rest.*", "utility"]),
    py_modules=["run"],
)
