from dataclasses import dataclass

import rclpy
from rclpy.node import Node
from std_msgs.msg import String

from minimal_publisher.topic_resolver import TopicResolver


@dataclass
class PublisherConfig:
    topic_search_key: str
    default_topic: str
    timer_period: float
    queue_depth: int
    message_text: str


class MinimalPublisher(Node):
    def __init__(self) -> None:
        super().__init__("minimal_publisher")

        self._declare_parameters()
        self.config = self._load_configuration()
        self.count = 0

        self.topic_name = TopicResolver(logger=self.get_logger()).resolve_topic_name(
            self.config.topic_search_key,
            self.config.default_topic
        )

        self.setup_publishers()
        self.get_logger().info(f"Publishing on topic '{self.topic_name}'")
        self.timer = self.create_timer(self.config.timer_period, self.timer_callback)


    def _declare_parameters(self) -> None:
        self.declare_parameters(
            namespace="",
            parameters=[
                ("publisher.topic_search_key", "OUTGOING_MESSAGE"),
                ("publisher.default_topic", "topic"),
                ("publisher.timer_period", 0.5),
                ("publisher.queue_depth", 10),
                ("publisher.message_text", "Hello, world!")
            ]
        )


    def _load_configuration(self) -> PublisherConfig:
        topic_search_key = self.get_parameter('publisher.topic_search_key').get_parameter_value().string_value
        default_topic = self.get_parameter('publisher.default_topic').get_parameter_value().string_value
        timer_period = self.get_parameter('publisher.timer_period').get_parameter_value().double_value
        queue_depth = self.get_parameter('publisher.queue_depth').get_parameter_value().integer_value
        message_text = self.get_parameter('publisher.message_text').get_parameter_value().string_value

        return PublisherConfig(
            topic_search_key=topic_search_key,
            default_topic=default_topic,
            timer_period=timer_period,
            queue_depth=queue_depth,
            message_text=message_text
        )


    def setup_publishers(self) -> None:
        self.publisher = self.create_publisher(
            String,
            self.topic_name,
            self.config.queue_depth
        )


    def timer_callback(self) -> None:
        try:
            msg = String()
            msg.data = f"{self.config.message_text} {self.count}"
            self.count += 1

            self.get_logger().info(f"Publishing: '{msg.data}'")
            self.publisher.publish(msg)
        except Exception as e:
            self.get_logger().error(f"Error publishing message: {e}")


def main(args=None):
    rclpy.init(args=args)

    try:
        node = MinimalPublisher()
        rclpy.spin(node)
    except KeyboardInterrupt:
        pass
    except Exception as e:
        print(f"Error running minimal publisher: {e}")
    finally:
        rclpy.shutdown()


if __name__ == "__main__":
    main()
