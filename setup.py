from setuptools import setup, find_packages

install_reqs = open('requirements.txt').read().splitlines()
long_desc = """
I/O-free stream coroutines. Reads and writes are expressed as resumable state
machines that hand buffers to a runtime instead of doing I/O themselves, so
the same code runs under blocking calls or asyncio.
"""


setup(
    name="streamcoro",
    version='0.1.0',
    description="I/O-free, resumable byte stream coroutines",
    long_description=long_desc,
    classifiers=[
        "Programming Language :: Python",
        "Programming Language :: Python :: 3",
    ],
    keywords="stream coroutine io-free asyncio",
    license="MIT",
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.8",
    install_requires=install_reqs,
    extras_require={
        "test": [
            "pytest",
            "pytest-asyncio",
            "pytest-mock",
            "decorator>=5",
        ],
    },
)
