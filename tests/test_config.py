# -*- coding: utf-8 -*-

import pytest

from procstat_probe import config
from procstat_probe.config import Config, ConfigError, ThresholdPair, update_dict


class TestLoad:

	def test_bundled_defaults(self):
		data, conf = config.load(env={})
		assert conf.hz == 100
		assert conf.paths.stat == '/proc/stat'
		assert conf.paths.loadavg == '/proc/loadavg'
		assert conf.thresholds.resolve('user') == ThresholdPair(None, None)
		assert list(data['collectors']) == ['cpu', 'swap', 'uptime', 'load']
		assert data['sink'] == 'munin'

	def test_layering(self, tmp_path):
		path1, path2 = tmp_path / 'a.yaml', tmp_path / 'b.yaml'
		path1.write_text('hz: 250\npaths: {stat: /tmp/stat}\nthresholds: {user: {warning: 50}}\n')
		path2.write_text('thresholds: {user: {critical: 70}}\n')
		data, conf = config.load([str(path1), str(path2)], env={})
		assert conf.hz == 250
		assert conf.paths.stat == '/tmp/stat'
		assert conf.paths.vmstat == '/proc/vmstat'
		assert conf.thresholds.user == ThresholdPair('50', '70')

	def test_env_overrides_yaml(self, tmp_path):
		path = tmp_path / 'a.yaml'
		path.write_text('hz: 250\nthresholds: {user: {warning: 50}}\n')
		data, conf = config.load([str(path)], env=dict(HZ='1000', user_warning='60%'))
		assert conf.hz == 1000
		assert conf.thresholds.user.warning == '60%'


class TestFromDict:

	paths = dict(stat='s', vmstat='v', swaps='w', uptime='u', loadavg='l')

	def test_hz_default(self):
		assert Config.from_dict(dict(paths=self.paths)).hz == 100

	@pytest.mark.parametrize('hz', ['0', '-100', 'fast'])
	def test_bad_hz(self, hz):
		with pytest.raises(ConfigError):
			Config.from_dict(dict(paths=self.paths), dict(HZ=hz))

	def test_bad_threshold(self):
		with pytest.raises(ConfigError):
			Config.from_dict(dict(paths=self.paths), dict(idle_critical='lots'))

	def test_missing_path(self):
		with pytest.raises(ConfigError):
			Config.from_dict(dict(paths=dict(stat='s')))

	def test_precedence(self):
		conf = Config.from_dict(dict(paths=self.paths),
			dict(warning='80%', critical='95%', nice_critical='50') )
		assert conf.thresholds.resolve('nice') == ThresholdPair('80%', '50')
		assert conf.thresholds.resolve('system') == ThresholdPair('80%', '95%')
		assert conf.thresholds.resolve('load15') == ThresholdPair('80%', '95%')

	def test_config_error_is_value_error(self):
		assert issubclass(ConfigError, ValueError)


def test_update_dict():
	dst = dict(a=dict(b=1, c=2), d=3)
	update_dict(dst, dict(a=dict(c=4, e=5), d=None))
	assert dst == dict(a=dict(b=1, c=4, e=5), d=None)
	update_dict(dst, dict(a=None))
	assert dst['a'] == dict(b=1, c=4, e=5)
