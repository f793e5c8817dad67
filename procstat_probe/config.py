# -*- coding: utf-8 -*-

import itertools as it, operator as op, functools as ft
from collections import namedtuple
from collections.abc import Mapping
import os

import yaml

from .collectors import scale_threshold, ParseError

import logging
log = logging.getLogger(__name__)


cpu_fields = ( 'user', 'nice', 'system', 'idle',
	'iowait', 'irq', 'softirq', 'steal', 'guest', 'guest_nice' )
load_fields = 'load1', 'load', 'load15'

default_path = '{}.yaml'.format(os.path.join(
	os.path.dirname(os.path.realpath(__file__)), 'probe' ))


class ConfigError(ValueError): pass


ThresholdPair = namedtuple('ThresholdPair', 'warning critical')
ThresholdPair.__new__.__defaults__ = None, None

Paths = namedtuple('Paths', 'stat vmstat swaps uptime loadavg')


class Thresholds(namedtuple('Thresholds', ('default',) + cpu_fields + load_fields)):
	__slots__ = ()

	def resolve(self, name):
		'Field-specific bound, falling back to the default one for each of warning/critical.'
		field, default = getattr(self, name), self.default
		return ThresholdPair(*(
			(v if v is not None else v_def) for v, v_def in zip(field, default) ))


class Config(namedtuple('Config', 'hz thresholds paths')):
	__slots__ = ()

	@classmethod
	def from_dict(cls, data, env=None):
		'''Build config from merged yaml data, with plugin env on top.
			Env keys: HZ, warning, critical, <field>_warning, <field>_critical.'''
		env = env or dict()

		hz = env.get('HZ', data.get('hz'))
		try:
			hz = int(hz if hz is not None else 100)
			if hz <= 0: raise ValueError(hz)
		except (TypeError, ValueError):
			raise ConfigError('Invalid clock ticks per second (HZ) value: {!r}'.format(hz))

		conf_th = data.get('thresholds') or dict()
		thresholds = list()
		for name in Thresholds._fields:
			pair = conf_th.get(name) or dict()
			pair = list(pair.get(k) for k in ThresholdPair._fields)
			for n, k in enumerate(ThresholdPair._fields):
				env_key = k if name == 'default' else '{}_{}'.format(name, k)
				if env.get(env_key) is not None: pair[n] = env[env_key]
				if pair[n] is None: continue
				try: scale_threshold(pair[n], 100)
				except ParseError:
					raise ConfigError('Invalid {} threshold for {}: {!r}'.format(k, name, pair[n]))
				pair[n] = str(pair[n]).strip()
			thresholds.append(ThresholdPair(*pair))

		paths = data.get('paths') or dict()
		try: paths = Paths(**dict((k, paths[k]) for k in Paths._fields))
		except KeyError as err:
			raise ConfigError('Missing path for input file: {}'.format(err.args[0]))

		return cls(hz, Thresholds(*thresholds), paths)


def update_dict(dst, src):
	'Recursive merge, values from src override ones in dst, None never replaces mappings.'
	for k, v in src.items():
		if isinstance(v, Mapping):
			if not isinstance(dst.get(k), Mapping): dst[k] = dict()
			update_dict(dst[k], v)
		elif v is not None or not isinstance(dst.get(k), Mapping): dst[k] = v
	return dst


def load_yaml(*paths):
	'Load and merge yaml files, values from latter ones override former.'
	data = dict()
	for path in paths:
		with open(path) as src: update_dict(data, yaml.safe_load(src) or dict())
	return data


def load(paths=(), env=None):
	'Returns (raw_data, Config) tuple from bundled defaults, extra yaml files and env.'
	data = load_yaml(default_path, *paths)
	if env is None: env = os.environ
	return data, Config.from_dict(data, env)
