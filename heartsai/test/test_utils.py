# -*- coding: utf-8 -*-

import pytest

from heartsai.utils import Config, rankdata

BASE_YML = """\
---
default:
  base_scoring_params:
    LeadScorer:
      base: 100
    DumpScorer:
      queen_of_spades: 250

tuning:
  base_scoring_params:
    LeadScorer:
      base: 120
"""

OVERRIDE_YML = """\
---
default:
  base_scoring_params:
    DumpScorer:
      queen_of_spades: 300
"""

@pytest.fixture
def config_dir(tmp_path):
    (tmp_path / 'base.yml').write_text(BASE_YML)
    (tmp_path / 'override.yml').write_text(OVERRIDE_YML)
    return str(tmp_path)

def test_config(config_dir):
    config = Config('base.yml', config_dir)
    params = config.config('base_scoring_params')
    assert params['LeadScorer'] == {'base': 100}
    assert config.config('not_a_section') == {}

    # returned copy is safe to modify
    params['LeadScorer'] = None
    assert config.config('base_scoring_params')['LeadScorer'] == {'base': 100}

    assert config.config('base_scoring_params', 'tuning')['LeadScorer'] == {'base': 120}
    with pytest.raises(RuntimeError):
        config.config('base_scoring_params', 'not_a_profile')

    assert config.load('override.yml')
    assert not config.load('override.yml')
    params = config.config('base_scoring_params')
    assert params['DumpScorer'] == {'queen_of_spades': 300}
    assert params['LeadScorer'] == {'base': 100}

def test_config_profile(config_dir):
    config = Config(['base.yml'], config_dir, profile='tuning')
    params = config.config('base_scoring_params')
    assert params['LeadScorer'] == {'base': 120}
    assert params['DumpScorer'] == {'queen_of_spades': 250}

def test_rankdata():
    scores = [54, 101, 38, 54]
    assert rankdata(scores, method='min', reverse=False) == [2, 4, 1, 2]
    assert rankdata(scores, method='min') == [2, 1, 4, 2]
    assert rankdata(scores) == [2.5, 1.0, 4.0, 2.5]
    with pytest.raises(ValueError):
        rankdata(scores, method='dense')
