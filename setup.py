from setuptools import find_packages, setup


setup(
    name="externaltext",
    version="0.3.0",
    description="Path-addressed external texts with fixed-point template interpolation and Markdown rendering",
    author="GAHEOS",
    python_requires=">=3.9",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    install_requires=[
        "Markdown>=3.4",
    ],
    extras_require={
        "test": ["pytest>=7"],
    },
)
