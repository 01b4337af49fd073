from setuptools import setup, find_packages

setup(
    name="adspath",
    version="0.1",
    packages=find_packages(include=["adspath", "adspath.*"]),
    python_requires=">=3.8",
    install_requires=["ldap3", "prompt_toolkit"],
    extras_require={"test": ["pytest"]},
    entry_points={"console_scripts": ["adspath=adspath.cli:main"]},
)
