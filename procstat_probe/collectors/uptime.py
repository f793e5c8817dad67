# -*- coding: utf-8 -*-

import itertools as it, operator as op, functools as ft

from . import Collector, Graph, Field, parse_flat_file

import logging
log = logging.getLogger(__name__)


class Uptime(Collector):

	def read(self):
		seconds, = parse_flat_file(self.conf.paths.uptime, count=1)
		return [Graph( 'uptime', 'Uptime', 'system', 'uptime in days', [
				Field( 'uptime', 'uptime', value='{:.2f}'.format(seconds / 86400.0),
					type='GAUGE', draw='AREA', min=0 ) ],
			args='--base 1000 -l 0', scale=False )]


collector = Uptime
