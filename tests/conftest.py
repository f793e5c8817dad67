# -*- coding: utf-8 -*-

import pytest

from procstat_probe.config import Config, Paths


STAT = '''\
cpu  100 10 50 800 5 1 1 0 20 5
cpu0 50 5 25 400 2 0 1 0 10 2
cpu1 50 5 25 400 3 1 0 0 10 3
intr 12345 0 1 2 3
ctxt 67890
btime 1700000000
processes 4321
procs_running 1
procs_blocked 0
softirq 555 1 2 3
'''

VMSTAT = '''\
nr_free_pages 1000
pgpgin 500
pgpgout 600
pswpin 11
pswpout 22
'''

SWAPS = '''\
Filename				Type		Size		Used		Priority
/dev/sda2                               partition	8388604		0		-2
'''

UPTIME = '123456.78 45000.00\n'
LOADAVG = '0.50 0.75 1.20 2/300 1234\n'

PROC_FILES = dict(stat=STAT, vmstat=VMSTAT, swaps=SWAPS, uptime=UPTIME, loadavg=LOADAVG)


@pytest.fixture
def proc(tmp_path):
	'Directory with fake /proc files, named same as Paths fields.'
	for name, data in PROC_FILES.items(): (tmp_path / name).write_text(data)
	return tmp_path


@pytest.fixture
def make_conf(proc):
	def make_conf(env=None, **data):
		data.setdefault('paths', dict((k, str(proc / k)) for k in Paths._fields))
		return Config.from_dict(data, env)
	return make_conf
