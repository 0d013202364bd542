from setuptools import setup, find_packages

with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

setup(
    name="bddgen",
    version="1.0.0",
    author="Your Name",
    author_email="your.email@example.com",
    description="Generate Playwright test skeletons from BDD feature files",
    long_description=long_description,
    long_description_content_type="text/markdown",
    url="https://github.com/yourusername/bddgen",
    packages=find_packages(exclude=["tests", "tests.*", "examples", "examples.*", "docs"]),
    py_modules=["run"],
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "Topic :: Software Development :: Testing",
        "Topic :: Software Development :: Code Generators",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
    python_requires=">=3.8",
    install_requires=[
        "pyyaml>=6.0.1",
        "click>=8.1.7",
        "jinja2>=3.1.2",
        "colorama>=0.4.6",
        "python-dotenv>=1.0.0",
    ],
    extras_require={
        "playwright": ["playwright>=1.40.0", "pytest-playwright>=0.4.3"],
        "dev": [
            "pytest>=7.4.3",
            "pytest-cov>=4.1.0",
            "black>=23.10.0",
            "flake8>=6.1.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "bddgen=run:main",
        ],
    },
    include_package_data=True,
    package_data={
        "bddgen.generator": ["templates/*.j2"],
    },
    keywords="automation testing playwright bdd gherkin code-generation",
    license="MIT",
)
