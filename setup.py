"""Module for setup tools.

Update install_requires list with
additional aws-cdk modules as required.
"""
import setuptools


with open("README.md") as fp:
    long_description = fp.read()

setuptools.setup(
    name="cdk_timestream",
    version="0.1.0",

    description="CDK constructs and deployment app for Amazon Timestream databases",
    long_description=long_description,
    long_description_content_type="text/markdown",

    author="niftynerd",
    author_email="niftynerd1337@gmail.com",

    packages=setuptools.find_packages(exclude=["tests", "tests.*"]),
    py_modules=["deploy_config"],

    install_requires=[
        "aws-cdk-lib>=2.100.0",
        "constructs>=10.0.0",
        "cdk-nag",
        "boto3"
    ],

    extras_require={
        "test": [
            "pytest>=7.0.0",
        ],
    },

    python_requires=">=3.8",

    classifiers=[
        "Development Status :: 4 - Beta",

        "Intended Audience :: Developers",

        "Programming Language :: Python :: 3",

        "Topic :: Software Development :: Code Generators",
        "Topic :: Utilities",

        "Typing :: Typed",
    ],
)
