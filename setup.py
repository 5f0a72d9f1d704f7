from setuptools import setup, find_namespace_packages

setup(
    name="netmask_utils",
    version="0.1.0",
    description="IPv4 subnet mask validation",
    packages=find_namespace_packages(include=["indisoluble*"]),
    python_requires=">=3.10",
    install_requires=[],
    extras_require={"test": ["pytest>=8.0.0"]},
)
