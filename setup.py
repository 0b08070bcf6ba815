from setuptools import setup, find_packages

with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

with open("requirements.txt", "r", encoding="utf-8") as fh:
    requirements = [line for line in fh.read().splitlines() if line and not line.startswith("#")]

setup(
    name="city-autocomplete",
    version="0.1.0",
    author="Hongrui Zhu",
    author_email="your.email@example.com",
    description="Debounced city autocomplete for a travel-itinerary planner",
    long_description=long_description,
    long_description_content_type="text/markdown",
    url="https://github.com/yourusername/travel-planner",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "Topic :: Travel",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
    python_requires=">=3.8",
    install_requires=requirements,
    extras_require={
        "test": ["pytest>=7.0"],
    },
    entry_points={
        "console_scripts": [
            "cityfind=city_autocomplete.__main__:main",
        ],
    },
)
