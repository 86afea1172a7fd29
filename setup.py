from setuptools import setup, find_packages

setup(
    name='chart-list-items',
    version='1.0.0',
    description='Selection-to-table pipeline for the chart "List items" tool view',
    packages=find_packages(exclude=['tests', 'tests.*']),
    install_requires=[
        'lxml>=6.0.0',
        'pyuca>=1.2',
    ],
    extras_require={
        'test': ['pytest'],
    },
    entry_points={
        'chart_list_items.selection_source': [
            'json = selection_source_json.plugin:JsonSelectionSourcePlugin',
            'xml = selection_source_xml.plugin:XmlSelectionSourcePlugin',
        ],
    },
    python_requires='>=3.10',
)
