from setuptools import find_packages, setup


def get_requirements():
    with open("requirements.txt") as fp:
        return [x.strip() for x in fp.read().split("\n") if x.strip() and not x.startswith("#")]


setup(
    name="sentry-protocol",
    version="0.1.0",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    python_requires=">=3.10",
    install_requires=get_requirements(),
    extras_require={"test": ["pytest>=7.0.1", "sentry-sdk>=1.40"]},
)
