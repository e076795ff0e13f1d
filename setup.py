from setuptools import find_packages, setup

classifiers = [
    "Development Status :: 5 - Production/Stable",
    "Intended Audience :: Developers",
    "License :: OSI Approved :: MIT License",
    "Operating System :: OS Independent",
    "Framework :: Twisted",
    "Programming Language :: Python",
    "Programming Language :: Python :: 3.8",
    "Programming Language :: Python :: 3.9",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: Implementation :: CPython",
    "Programming Language :: Python :: Implementation :: PyPy",
    "Topic :: Internet :: WWW/HTTP",
]

if __name__ == "__main__":

    with open("README.rst") as f:
        readme = f.read()

    setup(
        name="mimetype",
        packages=find_packages("src"),
        package_dir={"": "src"},
        setup_requires=["incremental"],
        use_incremental=True,
        python_requires=">=3.8",
        install_requires=[
            "incremental",
            "Twisted >= 22.10.0",
            "attrs",
            "typing_extensions >= 3.10.0",
            "zope.interface",
        ],
        extras_require={
            "dev": [
                "pep8",
                "pyflakes",
                "mypy",
            ],
        },
        description="Parse, edit and serialize MIME types and their parameters",
        author="The mimetype Authors",
        maintainer="The mimetype Authors",
        license="MIT/X",
        classifiers=classifiers,
        long_description=readme,
        long_description_content_type="text/x-rst",
    )
