#!/usr/bin/env python
# -*- coding: utf-8 -*-

import itertools as it, operator as op, functools as ft
from collections import OrderedDict
from collections.abc import Mapping
import os, sys

from procstat_probe import config
from procstat_probe.collectors import ParseError

import logging
log = logging.getLogger(__name__)


def configure_logging(cfg, custom_level=None):
	import logging.config
	if custom_level is None: custom_level = logging.WARNING
	if not cfg:
		logging.basicConfig(level=custom_level)
		return
	cfg = dict(cfg)
	capture_warnings = cfg.pop('warnings', False)
	tracebacks = cfg.pop('tracebacks', True)
	for entity in it.chain.from_iterable(map(
			op.methodcaller('values'),
			[cfg] + list(cfg.get(k, dict()) for k in ['handlers', 'loggers']) )):
		if isinstance(entity, Mapping)\
			and entity.get('level') == 'custom': entity['level'] = custom_level
	logging.config.dictConfig(cfg)
	logging.captureWarnings(capture_warnings)
	if not tracebacks:
		class NoTBLogger(logging.Logger):
			def exception(self, *argz, **kwz): self.error(*argz, **kwz)
		logging.setLoggerClass(NoTBLogger)


def load_plugins(ep_type, names):
	'Returns OrderedDict of {name: entry point object} for specified names, in that order.'
	from importlib.metadata import entry_points
	ep_dict = dict( (ep.name, ep) for ep in
		entry_points(group='procstat_probe.{}'.format(ep_type)) )
	plugins = OrderedDict()
	for name in names:
		if name[0] == '_':
			log.debug('Skipping {} entry point, prefixed by underscore: {}'.format(ep_type, name))
			continue
		try: plugins[name] = ep_dict[name]
		except KeyError: log.warning('Unknown {} entry point: {}'.format(ep_type, name))
	return plugins


def collect(collectors):
	'''Single pass over all collectors.
		Failing collector only loses its own graphs, others are unaffected.'''
	graphs = list()
	for name, collector in collectors.items():
		log.debug('Polling data from a collector (name: {}): {}'.format(name, collector))
		try: graphs.extend(list(collector.read()))
		except (OSError, ParseError) as err:
			log.info('Skipping graphs from collector (name: {}): {}'.format(name, err))
		except Exception as err:
			log.exception( 'Failed to poll collector'
				' (name: {}, obj: {}): {}'.format(name, collector, err) )
	return graphs


def run(collectors, sink, mode='fetch', dirtyconfig=False):
	'Collect graphs and pass them to sink, returning these.'
	graphs = collect(collectors)
	if mode == 'config':
		sink.configure(*graphs)
		if dirtyconfig: sink.dispatch(*graphs)
	elif mode == 'fetch': sink.dispatch(*graphs)
	else: raise ValueError('Unknown mode: {!r}'.format(mode))
	return graphs


def autoconf(conf, stream=None):
	stream = stream or sys.stdout
	if os.access(conf.paths.stat, os.R_OK): stream.write('yes\n')
	else: stream.write('no ({} is not readable)\n'.format(conf.paths.stat))


def main(args=None, env=None):
	import argparse
	parser = argparse.ArgumentParser(
		description='Report cpu, interrupts, forks, swap, uptime'
			' and load average from /proc in munin plugin format.')
	parser.add_argument('mode', nargs='?', default='fetch',
		choices=['fetch', 'config', 'autoconf'],
		help='Plugin run mode, as passed by munin-node (default: %(default)s).')

	parser.add_argument('-e', '--collector-enable',
		action='append', metavar='collector', default=list(),
		help='Enable only the specified metric collectors,'
				' can be specified multiple times.')
	parser.add_argument('-d', '--collector-disable',
		action='append', metavar='collector', default=list(),
		help='Explicitly disable specified metric collectors,'
			' can be specified multiple times. Overrides --collector-enable.')
	parser.add_argument('-s', '--sink', metavar='sink',
		help='Output sink to use instead of the one from configuration.')

	parser.add_argument('-c', '--config',
		action='append', metavar='path', default=list(),
		help='Configuration files to process.'
			' Can be specified more than once.'
			' Values from the latter ones override values in the former.'
			' Environment variables (e.g. HZ, warning, user_critical) override the values in any config.')
	parser.add_argument('--debug',
		action='store_true', help='Verbose operation mode.')
	optz = parser.parse_args(args)

	if env is None: env = os.environ
	# Read configuration files
	try: cfg, conf = config.load(optz.config, env=env)
	except config.ConfigError as err:
		logging.basicConfig()
		log.fatal('Configuration error: {}'.format(err))
		return 1

	# Logging
	configure_logging( cfg.get('logging'),
		logging.DEBUG if optz.debug else logging.WARNING )

	if optz.mode == 'autoconf':
		autoconf(conf)
		return 0

	# Override "enabled" collector parameters, based on CLI
	collectors = OrderedDict()
	for name, subconf in (cfg.get('collectors') or dict()).items():
		subconf = subconf or dict()
		enabled = subconf.get('enabled', True)
		if optz.collector_enable: enabled = name in optz.collector_enable
		if name in optz.collector_disable: enabled = False
		if enabled: collectors[name] = None
	for name, ep in load_plugins('collectors', list(collectors)).items():
		log.debug('Loading collector: {}'.format(name))
		try: collectors[name] = ep.load().collector(conf)
		except Exception as err:
			log.exception('Failed to load/init collector ({}): {}'.format(name, err))
	collectors = OrderedDict((k, v) for k, v in collectors.items() if v is not None)
	if not collectors:
		log.fatal('No collectors were properly enabled/loaded, bailing out')
		return 1
	log.debug('Collectors: {}'.format(collectors))

	sink_name = optz.sink or cfg.get('sink', 'munin')
	sink = load_plugins('sinks', [sink_name]).get(sink_name)
	if sink is None:
		log.fatal('Failed to find output sink: {}'.format(sink_name))
		return 1
	sink = sink.load().sink(conf)

	run( collectors, sink, mode=optz.mode,
		dirtyconfig=env.get('MUNIN_CAP_DIRTYCONFIG') == '1' )
	return 0

if __name__ == '__main__': sys.exit(main())
