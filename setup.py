from setuptools import setup, find_packages

setup(
    name="eng2p",
    version="0.1.0",
    description="Rule-based English Grapheme-to-Phoneme (G2P) with lexicon, numerals and espeak fallback",
    author="eng2p contributors",
    packages=find_packages(exclude=["tests", "scripts"]),
    python_requires=">=3.8",
    install_requires=[
        "num2words",
        "regex",
        "spacy>=3.0",
        "phonemizer>=3.0",
        "pandas",
        "pyyaml",
        "tqdm"
    ],
    extras_require={
        "test": ["pytest"]
    },
    include_package_data=True,
    zip_safe=False,
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
)
