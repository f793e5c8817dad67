# -*- coding: utf-8 -*-

import itertools as it, operator as op, functools as ft
import os

from . import Collector, Graph, Field, parse_keyed_file, fields_from_row

import logging
log = logging.getLogger(__name__)


class Swap(Collector):

	names = 'swap_in', 'swap_out'

	def counters(self):
		'Returns {swap_in: pages, swap_out: pages} or None if there are no such counters.'
		try: vmstat = parse_keyed_file(self.conf.paths.vmstat)
		except OSError as err:
			log.debug('Unable to read {}: {}'.format(self.conf.paths.vmstat, err))
			vmstat = dict()
		if 'pswpin' in vmstat and 'pswpout' in vmstat:
			return fields_from_row(self.names, [vmstat['pswpin'][0], vmstat['pswpout'][0]])
		# Old kernels (2.4) have these as "swap in out" line in /proc/stat
		stat = parse_keyed_file(self.conf.paths.stat)
		if 'swap' not in stat: return None
		return fields_from_row(self.names, stat['swap'])

	def read(self):
		if not os.access(self.conf.paths.swaps, os.R_OK):
			log.debug('No swap support detected ({} is missing), skipping'.format(self.conf.paths.swaps))
			return list()
		counters = self.counters()
		if counters is None:
			log.info('No swap activity counters found, skipping')
			return list()
		return [Graph( 'swap', 'Swap in/out', 'system',
			'pages per ${graph_period} in (-) / out (+)', [
				Field( 'swap_in', 'swap', value=counters['swap_in'],
					type='DERIVE', min=0, max=100000, graph=False ),
				Field( 'swap_out', 'swap', value=counters['swap_out'],
					type='DERIVE', min=0, max=100000, negative='swap_in' ) ],
			args='-l 0 --base 1000' )]


collector = Swap
