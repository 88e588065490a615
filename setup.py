# -*- coding: utf-8 -*-

import setuptools
import os

# for some reason os gets munged after this point on Windows, so compute it here.
readme_path = os.path.join(os.path.dirname(os.path.abspath(__file__)), "README.md")

setuptools.setup(
    name="niontagui",
    version="0.1.0",
    author="Nion Software",
    author_email="swift@nion.com",
    description="Declarative gui element trees with persistence-safe event handler bindings.",
    long_description=open(readme_path).read(),
    long_description_content_type="text/markdown",
    url="https://github.com/nion-software/niontagui",
    packages=["nion.tagui", "nion.tagui.test"],
    install_requires=['nionutils>=0.3.19'],
    extras_require={
        'test': ['pytest'],
    },
    license='Apache 2.0',
    classifiers=[
        "Development Status :: 2 - Pre-Alpha",
        "License :: OSI Approved :: Apache Software License",
        "Programming Language :: Python :: 3.8",
    ],
    test_suite="nion.tagui.test",
    python_requires='>=3.8',
)
