#!/usr/bin/env python

import itertools as it, operator as op, functools as ft
from glob import iglob
import os, sys

from setuptools import setup, find_packages

pkg_root = os.path.dirname(__file__)

entry_points = dict(console_scripts=['procstat-probe = procstat_probe.probe:main'])
entry_points.update(
	('procstat_probe.{}'.format(ep_type), list(
		'{0} = procstat_probe.{1}.{0}'\
			.format(os.path.basename(fn)[:-3], ep_type)
		for fn in iglob(os.path.join(
			pkg_root, 'procstat_probe', ep_type, '[!_]*.py' )) ))
	for ep_type in ['collectors', 'sinks'] )

# Error-handling here is to allow package to be built w/o README included
try: readme = open(os.path.join(pkg_root, 'README.txt')).read()
except IOError: readme = ''

setup(

	name = 'procstat-probe',
	version = '26.10.0',
	license = 'WTFPL',
	keywords = 'munin plugin proc stat cpu swap uptime load metrics',

	description = 'Munin plugin reporting cpu usage, interrupts,'
		' fork rate, swap activity, uptime and load average from /proc',
	long_description = readme,

	classifiers = [
		'Development Status :: 4 - Beta',
		'Environment :: No Input/Output (Daemon)',
		'Intended Audience :: System Administrators',
		'License :: OSI Approved',
		'Operating System :: POSIX :: Linux',
		'Programming Language :: Python',
		'Programming Language :: Python :: 3',
		'Programming Language :: Python :: 3 :: Only',
		'Topic :: System :: Monitoring',
		'Topic :: System :: Operating System Kernels :: Linux' ],

	python_requires = '>=3.10',
	install_requires = ['PyYAML'],
	extras_require = {'test': ['pytest']},

	packages = find_packages(exclude=['tests']),
	package_data = {'procstat_probe': ['probe.yaml']},
	scripts = ['plugins/procstat'],

	entry_points = entry_points )
