from setuptools import find_packages, setup
from setuptools.command.install import install


class InstallFileCount(install):
    """Install filecount and remind where the console script lands."""

    def run(self):
        super().run()
        print(f"✔ filecount installed; the 'filecount' script is in {self.install_scripts}")


setup(
    name="filecount",
    version="1.0.0",
    description="Byte and character counter for single files and CSV manifests",
    author="GAHEOS",
    python_requires=">=3.8",
    package_dir={"": "src"},
    packages=find_packages("src"),
    install_requires=[],
    extras_require={"test": ["pytest>=7"]},
    entry_points={"console_scripts": ["filecount=filecount.cli:main"]},
    cmdclass={"install": InstallFileCount},
)
