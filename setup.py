from setuptools import setup, find_packages

setup(
    name="minmaxheap",
    version="0.1.0",
    description="Min-max heap operations over caller-owned sequences",
    packages=find_packages(exclude=["test", "test.*"]),
    python_requires=">=3.7",
    install_requires=["numpy"],
    extras_require={
        "test": ["pytest", "sortedcontainers"],
    },
    entry_points={
        "console_scripts": ["minmaxheap = minmaxheap.shell:main"],
    },
)
