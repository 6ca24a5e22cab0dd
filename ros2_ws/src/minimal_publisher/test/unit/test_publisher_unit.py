import json
import os
import sys
import unittest
from unittest.mock import Mock, MagicMock, patch

import pytest
import yaml

pytest.importorskip("rclpy")

from std_msgs.msg import String

from minimal_publisher.publisher_member_function import MinimalPublisher, PublisherConfig
from minimal_publisher.topic_naming import normalize_topic_key


CONFIG_PATH = os.path.join(
    os.path.dirname(__file__), '..', '..', '..', 'bringup', 'config', 'minimal_publisher.yaml'
)


class TestMinimalPublisher(unittest.TestCase):
    @classmethod
    def setUpClass(cls):
        with open(CONFIG_PATH, 'r') as f:
            config_data = yaml.safe_load(f)

        cls.config_params = config_data['minimal_publisher']['ros__parameters']['publisher']


    def setUp(self):
        self.received_messages = []
        self.node = self.create_node()


    def create_node(self) -> MinimalPublisher:
        with patch('minimal_publisher.publisher_member_function.Node.__init__', return_value=None):
            node = MinimalPublisher.__new__(MinimalPublisher)
            node.config = PublisherConfig(**self.config_params)
            node.count = 0
            node.publisher = Mock(publish=lambda msg: self.received_messages.append(msg))
            node.get_logger = MagicMock(return_value=MagicMock(
                info=lambda msg: print(msg, file=sys.stdout),
                warning=lambda msg: print(msg, file=sys.stderr),
                error=lambda msg: print(msg, file=sys.stderr),
                debug=lambda msg: print(msg, file=sys.stderr)
            ))

            return node


    def test_bringup_config_matches_defaults(self):
        self.assertEqual(self.node.config.topic_search_key, "OUTGOING_MESSAGE")
        self.assertEqual(self.node.config.default_topic, "topic")
        self.assertEqual(self.node.config.timer_period, 0.5)
        self.assertEqual(self.node.config.queue_depth, 10)


    def test_timer_publishes_incrementing_messages(self):
        for _ in range(3):
            self.node.timer_callback()

        self.assertEqual(len(self.received_messages), 3)
        self.assertIsInstance(self.received_messages[0], String)
        self.assertEqual(
            [msg.data for msg in self.received_messages],
            ["Hello, world! 0", "Hello, world! 1", "Hello, world! 2"]
        )
        self.assertEqual(self.node.count, 3)


    def test_publish_failure_is_logged(self):
        logger = MagicMock()
        self.node.get_logger = MagicMock(return_value=logger)
        self.node.publisher = Mock(publish=Mock(side_effect=RuntimeError("context invalid")))

        self.node.timer_callback()

        logger.error.assert_called_once()
        self.assertIn("context invalid", logger.error.call_args[0][0])


    def test_publisher_created_on_resolved_topic(self):
        topics = {"topics": [{"topic_name": "OUTGOING_MESSAGE", "topic_key": "robot/chatter"}]}
        self.node.create_publisher = MagicMock()
        self.node.create_timer = MagicMock()
        self.node.get_logger = MagicMock()

        with patch('minimal_publisher.publisher_member_function.Node.__init__', return_value=None), \
                patch.object(MinimalPublisher, '_declare_parameters'), \
                patch.object(MinimalPublisher, '_load_configuration', return_value=self.node.config), \
                patch.dict(os.environ, {"TOPICS": json.dumps(topics)}):
            self.node.__init__()

        self.assertEqual(self.node.topic_name, normalize_topic_key("robot/chatter"))
        self.node.create_publisher.assert_called_once_with(String, self.node.topic_name, 10)
        self.node.create_timer.assert_called_once_with(0.5, self.node.timer_callback)
        self.assertIn(self.node.topic_name, self.node.get_logger().info.call_args[0][0])


    def test_publisher_falls_back_to_default_topic(self):
        self.node.create_publisher = MagicMock()
        self.node.create_timer = MagicMock()

        with patch('minimal_publisher.publisher_member_function.Node.__init__', return_value=None), \
                patch.object(MinimalPublisher, '_declare_parameters'), \
                patch.object(MinimalPublisher, '_load_configuration', return_value=self.node.config), \
                patch.dict(os.environ, {}, clear=True):
            self.node.__init__()

        self.assertEqual(self.node.topic_name, "topic")
        self.node.create_publisher.assert_called_once_with(String, "topic", 10)
