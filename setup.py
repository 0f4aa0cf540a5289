from setuptools import find_packages, setup

# Retrieve release number from the package __init__.
# See https://packaging.python.org/guides/single-sourcing-package-version/.
with open("rackspace/__init__.py", encoding="utf8") as f:
    for line in f:
        if line.startswith("__version__"):
            version = line.split("=")[1].split('"')[1]

with open("README.md", encoding="utf-8") as f:
    long_description = f.read()

setup(
    name="rackspace",
    packages=find_packages(exclude=["tests", "tests.*"]),
    version=version,
    description="rackspace: token authentication, service catalog discovery and authenticated requests for the Rackspace cloud",
    author="Rackspace Python Client contributors",
    python_requires=">=3.10",
    long_description=long_description,
    long_description_content_type="text/markdown",
    install_requires=[
        "requests",
        "python-dotenv",
        "click",
        "toml",
    ],
    extras_require={
        "dev": [
            "ruff>=0.9.6,<1.0.0",
            "mypy>=1.0.0,<2.0.0",
        ],
        "test": [
            "pytest",
        ],
    },
    license="MIT",
    zip_safe=False,
    keywords=["Rackspace", "identity", "keystone", "cloud files", "cloud servers"],
    entry_points={
        "console_scripts": [
            "copy-rackspace-credentials-template=rackspace.utils.copy_credentials_template:cli"
        ],
    },
)
