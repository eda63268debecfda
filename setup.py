import os

from setuptools import find_packages, setup

BASE_PATH = os.path.abspath(os.path.dirname(__file__))

if __name__ == "__main__":
    setup(
        name="path-trie",
        license="Unlicense",
        description="A trie of slash separated paths with leaf-only persistence",
        long_description=open(os.path.join(BASE_PATH, "README.md")).read(),
        long_description_content_type="text/markdown",
        use_scm_version={
            "write_to": "path_trie/version.txt",
            "fallback_version": "0.1.0",
        },
        setup_requires=["setuptools_scm"],
        install_requires=open(os.path.join(BASE_PATH, "requirements.txt")).readlines(),
        extras_require={
            "test": ["pytest"],
        },
        python_requires=">=3.8",
        include_package_data=True,
        zip_safe=False,
        packages=find_packages(include=["path_trie", "path_trie.*"]),
        entry_points={
            "console_scripts": [
                "path-trie = path_trie.cli:main",
            ],
        },
        classifiers=[
            "Intended Audience :: Developers",
            "Topic :: Software Development :: Libraries :: Python Modules",
            "Programming Language :: Python :: 3",
            "Programming Language :: Python :: 3 :: Only",
            "Operating System :: OS Independent",
        ],
    )
