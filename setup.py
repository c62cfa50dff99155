from setuptools import find_packages, setup

setup(
    name="photocore",
    version="0.1.0",
    description="記憶卡匯入、RAW 內嵌預覽快取與可移除磁碟監控",
    package_dir={"": "src"},
    packages=find_packages("src"),
    python_requires=">=3.10",
    install_requires=["Pillow>=10.0"],
    extras_require={"test": ["pytest>=7.0"]},
    entry_points={"console_scripts": ["photocore=photocore.main:main"]},
)
